#!/usr/bin/env python3
"""Write the per-sample trace of a render to eqgraph.txt.

Usage:
    python examples/trace_minimal.py

The same file is written for every render when EQGRAPH_DEBUG=1 is set.
"""
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import eqgraph

with eqgraph.FileTrace("eqgraph.txt") as trace:
    eqgraph.graph("log(x)", -2, 2, 0.5, trace=trace).save("log.png")
