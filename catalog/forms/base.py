"""
Form validation and normalization.

A ``Form`` runs its fields in declared order and collects every error,
so the user sees every problem of a submission at once.

Example:
    ```python
    result = AuthorForm().validate(
        {"first_name": " Jane ", "family_name": "Austen"}
    )
    if result.is_valid:
        draft = build_draft(EntityKind.AUTHOR, result.cleaned)
    ```
"""

from typing import Any, ClassVar, Mapping

from pydantic import BaseModel, ConfigDict, Field
from starlette.datastructures import FormData

from catalog.exceptions import FieldError
from catalog.forms.fields import FormField, MultiValueField


class FormResult(BaseModel):
    """
    Outcome of validating one submission.

    Attributes:
        values: Sanitized values for re-rendering the form, including
            input that failed validation.
        cleaned: Typed values of the fields that passed validation.
        errors: Field errors in field declaration order.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    values: dict[str, Any] = Field(default_factory=dict)
    cleaned: dict[str, Any] = Field(default_factory=dict)
    errors: list[FieldError] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def error_for(self, field: str) -> FieldError | None:
        for error in self.errors:
            if error.field == field:
                return error
        return None


class Form:
    """Ordered set of field rules for one entity kind."""

    fields: ClassVar[tuple[FormField, ...]] = ()

    def validate(self, raw: Mapping[str, Any]) -> FormResult:
        result = FormResult()
        for field in self.fields:
            display, cleaned, error = field.process(raw.get(field.name))
            result.values[field.name] = display
            if error is None:
                result.cleaned[field.name] = cleaned
            else:
                result.errors.append(error)
        return result

    def initial(self, entity: Any) -> dict[str, Any]:
        """Values pre-filling the form from a stored record."""
        raise NotImplementedError


def form_to_dict(form: FormData, multi: tuple[str, ...] = ()) -> dict[str, Any]:
    """
    Flatten submitted form data.

    Names listed in ``multi`` keep every submitted value as a list; other
    names keep their last value.
    """
    data: dict[str, Any] = {}
    for key in form.keys():
        values = form.getlist(key)
        data[key] = values if key in multi else values[-1]
    return data


def multi_value_names(form: Form) -> tuple[str, ...]:
    return tuple(
        f.name for f in form.fields if isinstance(f, MultiValueField)
    )
