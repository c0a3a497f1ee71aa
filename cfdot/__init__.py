"""Flag checks, TLS settings and desired-LRP update handling for a Diego command-line tool."""

__version__ = "0.1.0"

__all__ = ["tls_flags", "update_desired_lrp", "validators"]