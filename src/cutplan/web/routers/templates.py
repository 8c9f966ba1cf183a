"""Template endpoints."""

import json

from fastapi import APIRouter

from cutplan.application.templates.manager import TEMPLATE_METADATA
from cutplan.web.dependencies import TemplateManagerDep
from cutplan.web.schemas.responses import (
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplateListSchema)
async def list_templates(manager: TemplateManagerDep) -> TemplateListSchema:
    """List the bundled example projects."""
    return TemplateListSchema(
        templates=[
            TemplateListItemSchema(name=name, description=desc)
            for name, desc in manager.list_templates()
        ]
    )


@router.get("/{name}", response_model=TemplateContentSchema)
async def get_template(name: str, manager: TemplateManagerDep) -> TemplateContentSchema:
    """Get the configuration of one example project.

    Raises:
        TemplateNotFoundError: If the template does not exist (handled as 404).
    """
    content = json.loads(manager.get_template(name))
    return TemplateContentSchema(
        name=name,
        description=TEMPLATE_METADATA.get(name, ""),
        content=content,
    )
