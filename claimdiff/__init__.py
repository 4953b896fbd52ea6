"""claimdiff: compare two compliance-suite claim files.

Computes a deterministic diff of cluster node topology, per-node CNI
configuration, and test-case results between two claim documents.
"""

__version__ = "0.3.0"
