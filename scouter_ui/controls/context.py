from __future__ import annotations

from dataclasses import dataclass, field

from ..animation import AnimationEngine, ImmediateAnimationEngine
from ..config import UIConfig, ambient_config
from ..state.scheduler import UpdateScheduler
from ..style.resolve import ColorResolver
from ..style.theme import Theme


@dataclass
class WidgetContext:
    """Collaborators shared by the widgets of one rendered tree.

    The theme reaches widgets only through `resolver`; swapping it replaces the
    resolver's theme wholesale.
    """

    resolver: ColorResolver
    scheduler: UpdateScheduler = field(default_factory=UpdateScheduler)
    animation: AnimationEngine = field(default_factory=ImmediateAnimationEngine)

    @classmethod
    def create(
        cls,
        theme: Theme | None = None,
        config: UIConfig | None = None,
        *,
        scheduler: UpdateScheduler | None = None,
        animation: AnimationEngine | None = None,
    ) -> WidgetContext:
        cfg = config or ambient_config()
        return cls(
            resolver=ColorResolver(theme or cfg.load_theme(), cfg),
            scheduler=scheduler or UpdateScheduler(),
            animation=animation or ImmediateAnimationEngine(),
        )

    @property
    def theme(self) -> Theme:
        return self.resolver.theme

    def use_theme(self, theme: Theme) -> None:
        self.resolver.use_theme(theme)

    def resolve(self, token: object, fallback: str = "black") -> str:
        return self.resolver.resolve(token, fallback)
