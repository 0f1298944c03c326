from .orchestrator import (
    WithdrawalOrchestrator,
    WithdrawalResult,
    withdraw,
)
