"""Option bag merging.

Implements the "explicit option > scope format > locale format > default"
precedence used throughout the engine.
"""

import copy
from typing import Any, Dict, Mapping


def prepare_options(*sources: Any) -> Dict[str, Any]:
    """Merge option bags from left to right, first set value wins.

    Sources that are not mappings (including None) are skipped, so optional
    arguments can be passed straight through. A key already holding a set
    value is never overwritten; a key holding None may be filled by a later
    source.

        prepare_options({"name": "John"}, {"name": "Mary", "role": "user"})
        # {"name": "John", "role": "user"}

    Args:
        *sources: Option mappings in precedence order.

    Returns:
        A new dict; the sources are left untouched.
    """
    options: Dict[str, Any] = {}

    for subject in sources:
        if not isinstance(subject, Mapping):
            continue

        for attr, value in subject.items():
            if options.get(attr) is not None:
                continue
            options[attr] = value

    return options


def deep_merge(target: Dict[str, Any], source: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge source into target recursively; source wins on conflicts.

    Nested mappings are copied into new dicts, so source is never aliased.

    Args:
        target: Dict updated in place.
        source: Tree to merge in.

    Returns:
        target, for chaining.
    """
    for key, value in source.items():
        if isinstance(value, Mapping):
            base = target.get(key)
            target[key] = deep_merge(dict(base) if isinstance(base, Mapping) else {}, value)
        else:
            target[key] = copy.deepcopy(value)
    return target
