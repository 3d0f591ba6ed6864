"""
Mutation pipeline for create and update submissions.

A submission passes through an ordered list of stages, each receiving and
returning the same ``MutationContext``:

1. ``validate`` normalizes the raw input and collects field errors.
2. ``build`` turns the cleaned values into a draft.
3. ``execute`` persists the draft and records the locator.

A stage rejects the submission by leaving errors on the context; the
remaining stages are skipped and ``resolve_options`` loads the option sets
needed to render the form again.

Example:
    ```python
    context = await MutationPipeline(session_factory, EntityKind.BOOK).run(
        raw=form_to_dict(await request.form(), multi=("genre",))
    )
    if context.accepted:
        return RedirectResponse(context.locator, status_code=303)
    return render_form(context.values, context.errors, context.options)
    ```
"""

from typing import Any, Awaitable, Callable, Mapping
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.commands.mutation_commands import (
    CreateRecordCommand,
    MutationResult,
    UpdateRecordCommand,
)
from catalog.drafts import Draft, build_draft, build_update_draft
from catalog.exceptions import FieldError
from catalog.forms import FORMS, FormResult
from catalog.logging import logger
from catalog.models import EntityKind
from catalog.references import ReferenceOption, ResolveFormOptionsCommand
from catalog.utils.metrics import catalog_form_rejections_total


class MutationContext(BaseModel):
    """
    State accumulated while a submission moves through the pipeline.

    Attributes:
        kind: Entity kind of the submission.
        raw: Submitted form values.
        entity_id: Identifier of the record being updated, None on create.
        form: Validation outcome.
        draft: Candidate entity built from the cleaned values.
        result: Outcome of persisting the draft.
        options: Reference options for re-rendering a rejected form.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: EntityKind
    raw: dict[str, Any] = Field(default_factory=dict)
    entity_id: UUID | None = None
    form: FormResult | None = None
    draft: Draft | None = None
    result: MutationResult | None = None
    options: dict[str, list[ReferenceOption]] = Field(default_factory=dict)

    @property
    def is_update(self) -> bool:
        return self.entity_id is not None

    @property
    def errors(self) -> list[FieldError]:
        return self.form.errors if self.form else []

    @property
    def values(self) -> dict[str, Any]:
        return self.form.values if self.form else dict(self.raw)

    @property
    def rejected(self) -> bool:
        return bool(self.errors)

    @property
    def accepted(self) -> bool:
        return self.result is not None

    @property
    def locator(self) -> str | None:
        return self.result.locator if self.result else None


Stage = Callable[[MutationContext], Awaitable[MutationContext]]


class MutationPipeline:
    """
    Ordered stages turning a form submission into a stored record.

    Args:
        session_factory: Factory opening one session per store call.
        kind: Entity kind the submissions are for.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        kind: EntityKind,
    ):
        self.session_factory = session_factory
        self.kind = kind
        self.stages: list[Stage] = [self.validate, self.build, self.execute]

    async def run(
        self, raw: Mapping[str, Any], entity_id: UUID | None = None
    ) -> MutationContext:
        """
        Run a submission through every stage.

        Args:
            raw: Submitted form values.
            entity_id: Identifier of the record to update, None to create.

        Returns:
            The final context; either ``accepted`` with a locator or
            ``rejected`` with errors and options.

        Raises:
            NotFoundError: If the record to update does not exist.
            InvalidIdentifierError: If a submitted reference is malformed.
        """
        context = MutationContext(
            kind=self.kind, raw=dict(raw), entity_id=entity_id
        )
        for stage in self.stages:
            context = await stage(context)
            if context.rejected:
                return await self.resolve_options(context)
        return context

    async def validate(self, context: MutationContext) -> MutationContext:
        context.form = FORMS[self.kind]().validate(context.raw)
        return context

    async def build(self, context: MutationContext) -> MutationContext:
        if context.is_update:
            context.draft = build_update_draft(
                self.kind, context.form.cleaned, context.entity_id
            )
        else:
            context.draft = build_draft(self.kind, context.form.cleaned)
        return context

    async def execute(self, context: MutationContext) -> MutationContext:
        command_cls = (
            UpdateRecordCommand if context.is_update else CreateRecordCommand
        )
        context.result = await command_cls(
            self.session_factory, self.kind
        ).execute(context.draft)
        return context

    async def resolve_options(
        self, context: MutationContext
    ) -> MutationContext:
        catalog_form_rejections_total.labels(entity=self.kind.value).inc()
        logger.info(
            f"Rejected {self.kind.value} form: "
            + ", ".join(error.field for error in context.errors)
        )
        context.options = await ResolveFormOptionsCommand(
            self.session_factory, self.kind
        ).execute(context.values)
        return context
