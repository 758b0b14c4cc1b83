"""expressgen: interactive scaffolding for minimal Express projects."""

__version__ = "0.1.0"
