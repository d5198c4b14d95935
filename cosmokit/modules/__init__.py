"""cosmokit API modules."""

from ..modules.transaction import TransactionModule, unwrap_std_tx

__all__ = ["TransactionModule", "unwrap_std_tx"]
