"""
utils/constants.py

Purpose: Centralized static values

- Pagination defaults
- Document field names shared by repositories and resolvers
- Sort direction

(Prevents hardcoding across the codebase)
"""

# ============================================================
# PAGINATION
# ============================================================

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MIN_PAGE = 1
MIN_LIMIT = 1

# ============================================================
# DOCUMENT FIELDS
# ============================================================

ID_FIELD = "_id"

POST_USER_ID_FIELD = "userId"
POST_CREATED_AT_FIELD = "createdAt"
POST_UPDATED_AT_FIELD = "updatedAt"

# ============================================================
# SORT DIRECTIONS
# ============================================================

DESCENDING = -1
