"""Coś Oscarowego: Smart Match 추천 서비스"""

__version__ = "0.1.0"
