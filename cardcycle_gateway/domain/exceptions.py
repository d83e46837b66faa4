"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInstallmentCountError(DomainException):
    """Installment count is below 1"""

    def __init__(self, installment_count: int):
        self.installment_count = installment_count
        super().__init__(f"installment_count must be >= 1, got {installment_count}")
