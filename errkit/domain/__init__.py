"""Domain layer: ports the error subsystem depends on."""
