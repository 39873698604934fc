"""Top-level package for the Route Provider project.

Answers distance and route-count queries over a small directed,
weighted graph of academies.
"""
