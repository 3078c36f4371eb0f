"""YAML registry manifests.

A manifest declares groups of styles and scripts, their ordering
constraints and the group activations, and builds a ``Registry`` from them::

    groups:
      site:
        styles:
          - href: /css/global.css
          - {href: /css/print.css, media: print}
        scripts:
          - {src: /js/app.js, position: body_end, defer: true}
        orderings:
          styles:
            - {before: /css/global.css, after: /css/print.css}
    activate: [site]

Ordering entries name resources by URI. A URI declared in the same group
refers to that declared resource (the first one, when declared several
times); any other URI refers to a default resource with that URI, which is
a missing endpoint at resolution time unless added elsewhere. An undeclared
script takes the position of the declared script it is ordered against, so
position checks only apply between declared scripts.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .exceptions import ManifestError
from .group import Group, validate_group_name
from .registry import Registry
from .resources import Direction, Position, Script, Style

logger = logging.getLogger(__name__)


class StyleSpec(BaseModel):
    """A single style declaration."""

    model_config = ConfigDict(extra="forbid")

    href: str = Field(..., min_length=1, description="Stylesheet URI")
    media: Optional[str] = Field(None, description="Media condition, e.g. 'print'")
    direction: Optional[Direction] = Field(None, description="ltr | rtl")
    crossorigin: Optional[str] = None
    disabled: bool = False

    def to_style(self) -> Style:
        return Style(
            self.href,
            media=self.media,
            direction=self.direction,
            crossorigin=self.crossorigin,
            disabled=self.disabled,
        )


class ScriptSpec(BaseModel):
    """A single script declaration."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    src: str = Field(..., min_length=1, description="Script URI")
    position: Position = Field(Position.HEAD_END, description="head_start | head_end | body_start | body_end")
    async_: bool = Field(False, alias="async")
    defer: bool = False
    crossorigin: Optional[str] = None

    @field_validator("position", mode="before")
    @classmethod
    def _parse_position(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Position.parse(value)
        return value

    def to_script(self) -> Script:
        return Script(
            self.src,
            position=self.position,
            async_=self.async_,
            defer=self.defer,
            crossorigin=self.crossorigin,
        )


class OrderingSpec(BaseModel):
    """``before`` must be emitted ahead of ``after``."""

    model_config = ConfigDict(extra="forbid")

    before: str = Field(..., min_length=1)
    after: str = Field(..., min_length=1)
    required: Optional[bool] = Field(
        None,
        description="Defaults to the configured default_required",
    )


class GroupOrderings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    styles: List[OrderingSpec] = Field(default_factory=list)
    scripts: List[OrderingSpec] = Field(default_factory=list)


class GroupSpec(BaseModel):
    """The contents of one group."""

    model_config = ConfigDict(extra="forbid")

    styles: List[StyleSpec] = Field(default_factory=list)
    scripts: List[ScriptSpec] = Field(default_factory=list)
    orderings: GroupOrderings = Field(default_factory=GroupOrderings)

    def populate(self, group: Group, default_required: bool) -> None:
        """Add the declared resources and orderings to ``group``.

        Raises:
            IllegalConstraint: A script ordering contradicts script positions.
        """
        styles: Dict[str, Style] = {}
        for spec in self.styles:
            style = spec.to_style()
            styles.setdefault(spec.href, style)
            group.styles.add(style)

        scripts: Dict[str, Script] = {}
        for spec in self.scripts:
            script = spec.to_script()
            scripts.setdefault(spec.src, script)
            group.scripts.add(script)

        for ordering in self.orderings.styles:
            group.styles.add_constraint(
                styles.get(ordering.before, Style(ordering.before)),
                styles.get(ordering.after, Style(ordering.after)),
                default_required if ordering.required is None else ordering.required,
            )
        for ordering in self.orderings.scripts:
            before = scripts.get(ordering.before)
            after = scripts.get(ordering.after)
            # An undeclared endpoint takes the position of the declared one
            if before is None:
                before = Script(ordering.before, position=after.position if after else None)
            if after is None:
                after = Script(ordering.after, position=before.position)
            group.scripts.add_constraint(
                before,
                after,
                default_required if ordering.required is None else ordering.required,
            )


def _check_group_names(names: List[str]) -> List[str]:
    for name in names:
        reason = validate_group_name(name)
        if reason is not None:
            raise ValueError(f"{name!r}: {reason}")
    return names


class RegistryManifest(BaseModel):
    """Top-level manifest: groups plus activations."""

    model_config = ConfigDict(extra="forbid")

    groups: Dict[str, GroupSpec] = Field(default_factory=dict)
    activate: List[str] = Field(default_factory=list)
    deactivate: List[str] = Field(default_factory=list)

    @field_validator("groups")
    @classmethod
    def _validate_groups(cls, value: Dict[str, GroupSpec]) -> Dict[str, GroupSpec]:
        _check_group_names(list(value))
        return value

    @field_validator("activate", "deactivate")
    @classmethod
    def _validate_activations(cls, value: List[str]) -> List[str]:
        return _check_group_names(value)

    @classmethod
    def from_mapping(cls, data: Any, path: Optional[Path] = None) -> "RegistryManifest":
        """Validate already-parsed manifest data.

        Raises:
            ManifestError: The data does not match the manifest schema.
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ManifestError(path, "Manifest must be a mapping")
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ManifestError(path, str(exc)) from exc

    def to_registry(self, default_required: bool = True) -> Registry:
        """Build a new registry from this manifest.

        Args:
            default_required: ``required`` for orderings that omit it

        Raises:
            IllegalConstraint: A script ordering contradicts script positions.
        """
        registry = Registry()
        for name, spec in self.groups.items():
            group = registry.get_group(name)
            spec.populate(group, default_required)
        registry.activate(*self.activate)
        registry.deactivate(*self.deactivate)
        logger.debug(
            "Built registry with %d group(s), %d activation(s)",
            len(self.groups),
            len(registry.activations),
        )
        return registry


def load_manifest(path: Path) -> RegistryManifest:
    """Load and validate a manifest file.

    Raises:
        ManifestError: The file is missing, is not valid YAML or does not
            match the manifest schema.
    """
    if not path.exists():
        raise ManifestError(path, "Manifest file not found")
    yaml = YAML(typ="safe")
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.load(f)
    except (OSError, YAMLError) as exc:
        raise ManifestError(path, f"Could not read manifest: {exc}") from exc
    return RegistryManifest.from_mapping(data, path)
