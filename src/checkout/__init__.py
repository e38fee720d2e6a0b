"""Intermag checkout: order lifecycle with pluggable payment, delivery and discount strategies."""
