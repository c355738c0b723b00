from .lead import (  # noqa: F401
    Lead,
    LeadCreate,
    LeadUpdate,
    LeadView,
    Stage,
    STAGE_ORDER,
    STAGE_LABELS,
    Temperature,
)
