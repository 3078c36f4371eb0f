from pathlib import Path

from resource_registry.exceptions import (
    ConstraintViolation,
    CycleDetected,
    IllegalConstraint,
    InvalidIdentifier,
    ManifestError,
    MissingRequiredEndpoint,
    RegistryError,
)


def test_missing_required_endpoint():
    """MissingRequiredEndpoint names the missing and the present endpoint."""
    exc = MissingRequiredEndpoint("x.css", "a.css", missing_before=True)
    assert isinstance(exc, ConstraintViolation)
    assert exc.missing == "x.css"
    assert exc.present == "a.css"
    assert "before = x.css" in str(exc)
    assert "after  = a.css" in str(exc)


def test_cycle_detected():
    """CycleDetected closes the loop in its message."""
    exc = CycleDetected(["a", "b"])
    assert isinstance(exc, ConstraintViolation)
    assert exc.cycle == ("a", "b")
    assert str(exc) == "Required ordering constraints form a cycle: a -> b -> a"


def test_illegal_constraint():
    """IllegalConstraint stores both endpoints and the reason."""
    exc = IllegalConstraint("late.js", "early.js", "before.position > after.position")
    assert isinstance(exc, RegistryError)
    assert isinstance(exc, ValueError)
    assert exc.reason == "before.position > after.position"
    assert str(exc) == "before.position > after.position: late.js > early.js"


def test_invalid_identifier():
    """InvalidIdentifier stores the rejected name."""
    exc = InvalidIdentifier("a b", "Group names may not contain whitespaces (position 2)")
    assert exc.name == "a b"
    assert str(exc) == "Group names may not contain whitespaces (position 2)"


def test_manifest_error_prefixes_path():
    """ManifestError prefixes the manifest path when known."""
    assert str(ManifestError(Path("site.yaml"), "bad")) == "site.yaml: bad"
    assert str(ManifestError(None, "bad")) == "bad"
