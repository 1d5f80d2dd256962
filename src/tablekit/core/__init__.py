"""
Core package for tablekit (table primitives, census, serializers, comparator, hashing).

## Contracts (single source of truth)
- Tables — what counts as a table, shallow iteration, canonical key ordering.
- Census — occurrence counts per table identity; terminates on cycles.
- Serialize — canonical, cycle-safe strings (`serialize`, `serialize_deep`).
- Compare — `is_subset`, `deep_equal`, `shallow_equal`.
- Hashing — canonical keys and SHA-256 digests over the deep canonical string.
- Errors/Constants/Typing — `BadInput`, string tokens, aliases.

## Notes
- Zero‑IO policy: stdlib only; no file/network IO, no mutation of input tables.
- Identity policy: tables are tracked by `id()`, never by contents.
- Sequences are tables keyed by 1-based position.
- Comparison is not cycle-safe; the census and serializers are.

## Downstream usage
- tablekit.io — settings that pick the key ordering and configure logging.
- Callers needing an equality key for nested data use `hashing.canonical_key`.

## Examples
```python
from tablekit.core.census import census
from tablekit.core.serialize import serialize, serialize_deep
from tablekit.core.compare import deep_equal

serialize({"a": 1, "b": True, 3: "hi"})  # '{"a":1,"b":true,3:"hi"}'

kyle = {"name": "Kyle"}
kyle["child"] = kyle
census(kyle)[kyle]  # 2
serialize_deep(kyle)  # '<0>{"child":&0,"name":"Kyle"}'
deep_equal(kyle, kyle)  # True
```
"""
