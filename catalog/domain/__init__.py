"""Domain layer: collection model, entities, errors and protocols."""
