"""Owner line resolution pipeline (split -> classify -> resolve -> assemble)."""
