"""
Constants for the S3 signing transport.
Header names and signing rules follow the S3 REST authentication scheme.
"""

# URL schemes
SCHEME = "s3"
SCHEME_PREFIX = SCHEME + "://"
SECURE_SCHEME = "https"

# HTTP Headers
HEADER_DATE = "Date"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_MD5 = "Content-MD5"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_AMZ_DATE = "X-Amz-Date"
HEADER_SECURITY_TOKEN = "X-Amz-Security-Token"
AMZ_HEADER_PREFIX = "x-amz-"

# Environment variables read by keys_from_environment()
ENV_ACCESS_KEY = "S3_ACCESS_KEY"
ENV_SECRET_KEY = "S3_SECRET_KEY"
ENV_SECURITY_TOKEN = "S3_SECURITY_TOKEN"

DEFAULT_DOMAIN = "amazonaws.com"

# Default configuration values
DEFAULT_CONFIG = {
    'domain': DEFAULT_DOMAIN,
}

# Query parameters that are part of the canonical resource
SIGNED_SUBRESOURCES = frozenset([
    'accelerate',
    'acl',
    'analytics',
    'cors',
    'delete',
    'inventory',
    'lifecycle',
    'location',
    'logging',
    'metrics',
    'notification',
    'object-lock',
    'partNumber',
    'policy',
    'replication',
    'requestPayment',
    'response-cache-control',
    'response-content-disposition',
    'response-content-encoding',
    'response-content-language',
    'response-content-type',
    'response-expires',
    'restore',
    'select',
    'select-type',
    'storageClass',
    'tagging',
    'torrent',
    'uploadId',
    'uploads',
    'versionId',
    'versioning',
    'versions',
    'website',
])
