"""npminit - interactive package.json initializer with npm name checks."""

__version__ = "1.0.0"
