from __future__ import annotations

import dataclasses

import pytest

from gridplane.api.errors import GridError, InvalidArgumentError
from gridplane.api.objects import ObjectKind, Style, TextAlignment, resolve_alignment, resolve_kind


def test_style_merge_overrides_only_given_fields() -> None:
    base = Style(colour="blue", font_size=10)
    merged = base.merged({"fill": True})
    assert merged == Style(colour="blue", font_size=10, fill=True)
    assert base.fill is False
    assert base.merged(None) is base


def test_style_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        Style().colour = "red"  # type: ignore[misc]


def test_unknown_style_fields_are_listed() -> None:
    with pytest.raises(InvalidArgumentError, match="alpha, blur"):
        Style().merged({"blur": 1, "alpha": 0.5})


@pytest.mark.parametrize("name", ["shape", "circle", "function", "line", "text", "image"])
def test_every_kind_name_resolves(name: str) -> None:
    assert resolve_kind(name) is ObjectKind(name)


def test_unknown_kind_is_an_invalid_argument() -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        resolve_kind("polygon")
    assert isinstance(excinfo.value, GridError)
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("raw", ["left", "Right", "CENTER", TextAlignment.RIGHT])
def test_alignment_normalizes(raw) -> None:
    assert resolve_alignment(raw).value == str(raw).lower()


def test_unknown_alignment_names_choices() -> None:
    with pytest.raises(InvalidArgumentError, match="left, center, right"):
        resolve_alignment("justify")


@pytest.mark.parametrize("raw", [" left", "center ", ""])
def test_alignment_names_must_match_exactly(raw: str) -> None:
    with pytest.raises(InvalidArgumentError):
        resolve_alignment(raw)
