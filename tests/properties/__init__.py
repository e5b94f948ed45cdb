from properties.generators import (
    GeneratorConfig,
    GeneratorMode,
    SequenceGenerator,
    SimilarSequenceGenerator,
    SectionGenerator,
    EdgeCaseGenerator,
    TestCaseGenerator,
    DiffTestCase,
    generate_random_sequences,
    generate_random_sections,
    generate_similar_sections,
)


__all__ = [
    "GeneratorConfig",
    "GeneratorMode",
    "SequenceGenerator",
    "SimilarSequenceGenerator",
    "SectionGenerator",
    "EdgeCaseGenerator",
    "TestCaseGenerator",
    "DiffTestCase",
    "generate_random_sequences",
    "generate_random_sections",
    "generate_similar_sections",
]
