"""
Module: slides.config

Purpose:
    Render options for the slides renderer. Immutable configuration,
    normalised on construction.

Key Classes:
    - SlidesRenderOptions: Theme, manifest template and URL base

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - slides.renderer: render_slides()
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


@dataclass(frozen=True)
class SlidesRenderOptions:
    """
    Options for rendering a SlidesPackage (immutable).

    Attributes:
        theme: Slidev theme name substituted for ``#[modmod:theme]``
        package_json: Optional manifest template; the built-in stub is used if None
        url_base: Path segment the built decks are served under, e.g. "course".
            Leading and trailing slashes are ignored.

    Example:
        >>> options = SlidesRenderOptions(
        ...     theme="seriph",
        ...     package_json=Path("templates/package.json"),
        ...     url_base="/rust-course/",
        ... )
        >>> options.base_path
        'rust-course'
    """

    theme: str
    package_json: Optional[Union[Path, str]] = None
    url_base: str = ""

    def __post_init__(self) -> None:
        """Normalise options on construction."""
        if self.package_json is not None and not isinstance(self.package_json, Path):
            # Frozen: bypass __setattr__ to store the normalised path
            object.__setattr__(self, "package_json", Path(self.package_json))

    @property
    def base_path(self) -> str:
        """URL base without leading or trailing slashes."""
        return self.url_base.strip("/")
