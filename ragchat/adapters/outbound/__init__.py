"""Outbound adapters: vector store, embeddings, LLM, session store."""
