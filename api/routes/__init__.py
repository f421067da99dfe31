# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""Route handlers following Single Responsibility Principle

Each router module handles a single resource/concept:
- movies: title search and movie details
- comments: comment listing and insertion
- health: health/monitoring endpoints
"""
