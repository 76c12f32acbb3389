"""
Patternkit - a catalogue of classic object-oriented design patterns.

- patternkit.behavioural: iterator and template-method parsers
- patternkit.creational: prototype (deep, shallow, and linked clones)
- patternkit.core: errors, logging, settings
"""

__version__ = "0.1.0"
