"""Engine pieces for a brick-breaking arcade game: colours, vectors, rectangles,
pixel surfaces, WAVE loading and mixing, a high-score table and mouse-driven widgets."""

__version__ = "0.1.0"