"""Infrastructure layer: stream and file input.

This layer reads raw text only. Normalization and matching live in
the domain layer; the service layer bridges the two.
"""
