"""
FOLIO - Friendly Overview of Life, Interests and Objectives

A personal-portfolio backend that loads a resume from a JSON document and
answers questions about it.

Architecture:
- Profile Context: One-time loading of the resume data and timeline classification
- Assistant Context: Keyword-routed canned answers to visitor questions
- Matching Context: Keyword-based job description match scoring
- Presentation Context: Plain-text layout of sections, answers and match results
"""

__version__ = "0.1.0"
