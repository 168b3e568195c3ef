"""netstub: static HTTP responses for intercepted test traffic."""

__version__ = '1.0.0'
