#Docstring for the package
"""
Packaging Reduction Ratio Audit

This package contains the core modules for:

- Loading sales ledger and packaging template exports (CSV / Excel)
- Resolving inconsistent spreadsheet headers
- Joining sales lines to packaging specs and computing weight ratios
- Classifying each line against the weight-bracket limits
- Writing the compliance report

Subpackages:
- core
- engines
- visualization
- outputs

"""

#Import modules to be exposed at the package level
from . import core, engines, visualization, outputs
__all__ = [
    "core",
    "engines",
    "visualization",
    "outputs",
]
