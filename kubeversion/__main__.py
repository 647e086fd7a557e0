"""Allow ``python -m kubeversion``."""

from .cli import run

run()
