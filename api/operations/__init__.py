# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""Operations layer for the movie comments API.

This package handles API-facing operations:
- Movie title search and details (MovieQueries)
- Comment listing and insertion (CommentQueries)
"""
