"""Domain errors raised by report computations."""


class LedgerError(Exception):
    """Base error for ledger reporting."""


class UpstreamFetchError(LedgerError):
    """The ledger store could not be queried."""


class MissingDateError(LedgerError):
    """A transaction carries neither a due date nor a creation date.

    Args:
        transaction_id: Identifier of the offending transaction.
    """

    def __init__(self, transaction_id: str) -> None:
        super().__init__(
            f"Transaction {transaction_id} has no due_date and no created_at"
        )
        self.transaction_id = transaction_id


__all__ = ["LedgerError", "UpstreamFetchError", "MissingDateError"]
