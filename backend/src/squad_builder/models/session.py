"""Models for team editor sessions."""

import time
from dataclasses import dataclass, field

from squad_builder.services.composition_editor import CompositionEditor


@dataclass
class EditorSession:
    """State for an active team editor session."""

    session_id: str
    editor: CompositionEditor
    created_at: float = field(default_factory=time.time)
    last_access: float = field(default_factory=time.time)
    operation_count: int = 0
