"""
Ingestion — CSV loading, chunking, and embedding into the vector store.

Turns the packaged movies table into LangChain documents, splits them
into text segments and writes the embedded segments to the configured
vector-store backend.
"""
