# Log event codes
TOKEN_ISSUED = 'TOKEN_ISSUED'
VIDEO_LINK_REGISTERED = 'VIDEO_LINK_REGISTERED'
SHORT_LINK_CREATED = 'SHORT_LINK_CREATED'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
STREAM_STARTED = 'STREAM_STARTED'
BAD_REQUEST = 'BAD_REQUEST'
FORBIDDEN = 'FORBIDDEN'
NOT_FOUND = 'NOT_FOUND'
UPSTREAM_ERROR = 'UPSTREAM_ERROR'
DATA_STORE_ERROR = 'DATA_STORE_ERROR'
