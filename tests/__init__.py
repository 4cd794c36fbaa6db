"""
Test suite for numtraits

Contains:
- tests/unit/          : Unit tests для capability sets, primitive conformances,
                         math backends, registry и конфигурации
"""
