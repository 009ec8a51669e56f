"""Application layer - use cases.

Command handlers orchestrate entities, repositories, and the event
dispatcher. They import only from the domain and core layers; adapters are
injected through protocols.
"""
