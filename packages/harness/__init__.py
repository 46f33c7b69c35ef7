from .core import audit_case, audit_batch, summarize, sample_targets
from .io import write_csv, write_manifest

__all__ = ["audit_case", "audit_batch", "summarize", "sample_targets",
           "write_csv", "write_manifest"]
