"""
Cosmic Dodge - Game Info

This file defines the game's metadata and provides the factory function
for creating game instances.
"""

# Game metadata
NAME = "Cosmic Dodge"
DESCRIPTION = "Steer your ship and dodge the falling asteroids."
VERSION = "1.0.0"
AUTHOR = "Dodgekit Team"


def get_game_mode(**kwargs):
    """
    Factory function to create a CosmicDodgeMode instance.

    Args:
        **kwargs: Game configuration options
            - display: Window surface (required for drawing)
            - seed: Random seed
            - player_radius: Ship radius
            - lerp_factor: Pointer easing per frame
            - collision_margin: Collision forgiveness in pixels

    Returns:
        CosmicDodgeMode instance, or None if no display surface was given
    """
    from games.CosmicDodge.config import TUNING
    from games.CosmicDodge.game_mode import CosmicDodgeMode

    # Filter out None values
    game_kwargs = {k: v for k, v in kwargs.items() if v is not None}

    # Tuning overrides from CLI names
    tuning_map = {
        'lerp_factor': 'lerp_factor',
        'collision_margin': 'collision_margin',
    }
    overrides = {}
    for cli_name, field_name in tuning_map.items():
        if cli_name in game_kwargs:
            overrides[field_name] = game_kwargs.pop(cli_name)
    if overrides:
        game_kwargs['tuning'] = type(TUNING)(**{**TUNING.model_dump(), **overrides})

    constructor_kwargs = {}
    for name in ('seed', 'player_radius', 'tuning', 'viewport',
                 'on_score', 'on_final_score', 'scheduler'):
        if name in game_kwargs:
            constructor_kwargs[name] = game_kwargs[name]

    return CosmicDodgeMode.activate(game_kwargs.get('display'), **constructor_kwargs)
