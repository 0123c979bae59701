"""Invoice use cases: generation, listing and payment simulation"""
