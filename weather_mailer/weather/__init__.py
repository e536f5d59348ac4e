"""Weather analysis: forecast models, time bucketing, rain timing, advice and rendering."""
