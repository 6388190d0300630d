"""Domain layer for spendly: SMS extraction, categorization and import."""
