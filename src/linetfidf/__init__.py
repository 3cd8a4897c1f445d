"""Per-block TF-IDF statistics over large line-oriented text files.

The input is split into fixed-size blocks of lines ("documents"), term counts
are accumulated per block, and every term in every block gets a TF-IDF score.
Scoring only happens once the whole corpus has been ingested.
"""
