"""Validators de entrada HTTP.

Estrutura:
- leads/: headers e body de submissões de lead
"""

__all__: list[str] = []
