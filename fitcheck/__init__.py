"""
FITCHECK - Fit Inspection of Targeted Candidates by Keyword

A keyword-presence resume scorer that measures how well a structured resume
covers the keywords of a target role or job profile, and explains the gaps.

Architecture:
- Intake Context: Resume and target-profile data structures, profile tables
- Targeting Context: Text extraction, keyword matching, scoring, gap analysis
"""

__version__ = "0.1.0"
