from __future__ import annotations

"""Implementors of `rand::Rng` across the documented workspace.

Importing this module publishes its map to the process-wide hand-off cell,
the same way the trait page's data script does in the browser.
"""

from ...core.entries import ImplementorEntry, build_implementor_map
from ...core.handoff import HandoffCell, HandoffState, publish as _publish

TRAIT = "rand/trait.Rng"

_FORTUNA = ImplementorEntry(
    trait="Rng",
    trait_href="rand/trait.Rng.html",
    trait_path="rand::Rng",
    implementor="Fortuna",
    implementor_href="crypto/fortuna/struct.Fortuna.html",
    implementor_path="crypto::fortuna::Fortuna",
    kind="struct",
)

IMPLEMENTORS = build_implementor_map(
    {
        "arrayvec": [],
        "bitcrypto": [_FORTUNA],
        "bytes": [],
        "chain": [],
        "clap": [],
        "crypto": [_FORTUNA],
        "db": [],
        "hyper": [],
        "import": [_FORTUNA],
        "jsonrpc_core": [],
        "jsonrpc_http_server": [],
        "jsonrpc_macros": [],
        "jsonrpc_pubsub": [],
        "keys": [],
        "libc": [],
        "message": [],
        "mio": [],
        "network": [_FORTUNA],
        "owning_ref": [],
        "p2p": [],
        "parking_lot": [],
        "parking_lot_core": [],
        "primitives": [],
        "rand": [],
        "regex_syntax": [],
        "rocksdb": [],
        "rpc": [],
        "script": [],
        "serde": [],
        "serialization": [],
        "syn": [],
        "tokio_core": [],
        "verification": [_FORTUNA],
    }
)


def publish(cell: HandoffCell | None = None) -> HandoffState:
    return _publish(IMPLEMENTORS, cell=cell)


publish()
