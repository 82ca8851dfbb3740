"""Calorie tracker backend: food catalog seeding and topic notifications."""
