# Log event codes (error responses log the error's own `error_code`)
INDEX_PAGE = 'INDEX_PAGE'
INDEX_REDIRECT = 'INDEX_REDIRECT'
PASTE_CREATED = 'PASTE_CREATED'
PASTE_FOUND = 'PASTE_FOUND'
PASTE_NOT_FOUND = 'PASTE_NOT_FOUND'
INVALID_PASTE_ID = 'INVALID_PASTE_ID'
