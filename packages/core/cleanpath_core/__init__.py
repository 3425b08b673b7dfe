"""CleanPath core: request path canonicalization."""

from cleanpath_core.exceptions import CleanPathError, RedirectTargetError
from cleanpath_core.pathing import (
    UNCHANGED,
    CanonicalizationResult,
    Changed,
    Unchanged,
    canonicalize_path,
    has_extension,
    is_canonical,
    normalize_path,
)
from cleanpath_core.redirect import build_redirect_target, split_path_and_query
from cleanpath_core.settings import Settings, get_settings

__all__ = [
    "UNCHANGED",
    "CanonicalizationResult",
    "Changed",
    "CleanPathError",
    "RedirectTargetError",
    "Settings",
    "Unchanged",
    "build_redirect_target",
    "canonicalize_path",
    "get_settings",
    "has_extension",
    "is_canonical",
    "normalize_path",
    "split_path_and_query",
]
