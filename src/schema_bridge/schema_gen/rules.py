"""Rule index: lookup of a descriptor's applied rules by name."""
from typing import Any, Dict, Iterable, List, Optional

from ..models.descriptor import SchemaDescriptor


def index_rules(descriptor: SchemaDescriptor) -> Dict[str, Optional[Dict[str, Any]]]:
    """Map rule name to its params. Unnamed rules are skipped; a repeated name keeps the last params."""
    index: Dict[str, Optional[Dict[str, Any]]] = {}
    for rule in descriptor.rules:
        if not rule.name:
            continue
        index[rule.name] = rule.params
    return index


def find_rules(descriptor: SchemaDescriptor, candidates: Iterable[str]) -> List[str]:
    """Return the candidates present on the descriptor, in candidate order (not rule order)."""
    present = index_rules(descriptor)
    return [name for name in candidates if name in present]
