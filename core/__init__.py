"""Range equity engine: cards, enumeration, classification, aggregation."""
