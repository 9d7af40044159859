"""Allow running with ``python -m credential_intake``."""

from .main import main

main()
