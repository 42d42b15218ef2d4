from formrender.schemas.fields import FieldDescriptor, FieldType, FormDescriptor, coerce_field

__all__ = ["FieldDescriptor", "FieldType", "FormDescriptor", "coerce_field"]
