"""
Dodgekit - small arcade runtime for pygame games.

Provides logging, the standard game state enum, the BaseGame contract,
a cooperative frame scheduler and pointer input handling.
"""
