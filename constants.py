"""
Global constants used throughout the project
"""

from operator import attrgetter

from localtypes import EdgeOrdering

# Distance assigned to vertices not reached yet. Kept as an int so distances
# stay integral; sums of real weights are expected to stay well below it.
INFINITY = 0x3F3F3F3F

# Returned by max flow when the source is also the sink
NO_FLOW = -1

# Spanning trees take the lightest edges first unless told otherwise
DEFAULT_EDGE_ORDERING: EdgeOrdering = attrgetter("weight")
