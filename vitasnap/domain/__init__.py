"""Domain layer: scoring, health conditions, dietary checks, product mapping."""
