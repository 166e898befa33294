"""
Child Insight Engine.

Turns repeated child wellbeing measurements (assessment answers, grade
records, physical and eating-habit records) into scores, severities and
ranked recommendations.
"""

__version__ = "0.1.0"
