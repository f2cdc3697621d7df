"""UNO rules engine."""
