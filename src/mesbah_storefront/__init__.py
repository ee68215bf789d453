"""Mesbah storefront: Solara pages around a synchronized budget range slider."""
