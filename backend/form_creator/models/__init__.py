from form_creator.models.form import Form
from form_creator.models.form_response import FormResponse

__all__ = [
    "Form",
    "FormResponse",
]
