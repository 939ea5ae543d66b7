"""Coast FIRE, traditional FIRE, mortgage burden and growth-rate projections."""

__version__ = "0.1.0"
