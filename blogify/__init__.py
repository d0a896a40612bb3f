"""
Blogify — ядро блог-платформы: ленты статей, редактор, кабинет автора.
"""

__version__ = "1.0.0"
