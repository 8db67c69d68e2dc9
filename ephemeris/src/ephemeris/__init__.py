"""Chart geometry engine: signs, aspects, houses and readings."""
