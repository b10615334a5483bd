"""
Lexical suggestion engine package.

- analyzers: Tokenizers and the stopword filter
- inverted_index: Token -> position postings
- scoring: Jaccard set similarity
- suggester: Item store, mutations and ranked queries
"""
