from .run_summary import RunSummary
from .specs_config import Release, Spec, SpecsConfig

__all__ = ["Release", "RunSummary", "Spec", "SpecsConfig"]
