"""Drake equation factors and the coexistence estimate built on them."""

from .equation import (
    CoexistenceEstimate,
    DrakeInputs,
    arrival_rate,
    drake_inputs_from_config,
    estimate_coexistence,
    habitable_planets,
    intelligent_civilizations,
    model_from_name,
    planets_in_galaxy
)

__all__ = [
    'CoexistenceEstimate',
    'DrakeInputs',
    'arrival_rate',
    'drake_inputs_from_config',
    'estimate_coexistence',
    'habitable_planets',
    'intelligent_civilizations',
    'model_from_name',
    'planets_in_galaxy'
]
