"""S3-compatible object storage service (Cloudflare R2 / MinIO)."""
import boto3
from botocore.client import Config
from botocore.exceptions import ClientError, BotoCoreError
from typing import Optional, BinaryIO
import logging

from src.app.config import settings
from src.app.exceptions import UpstreamError

logger = logging.getLogger(__name__)


# Prefix match on the MIME type; anything unknown is stored as .jpg
CONTENT_TYPE_EXTENSIONS = (
    ('image/jpeg', '.jpg'),
    ('image/png', '.png'),
    ('image/gif', '.gif'),
    ('image/webp', '.webp'),
    ('image/heic', '.heic'),
    ('image/heif', '.heif'),
)
DEFAULT_EXTENSION = '.jpg'


class S3ServiceError(UpstreamError):
    """Custom exception for S3 service errors."""
    pass


class ObjectNotFoundError(S3ServiceError):
    """The requested key does not exist in the bucket."""
    pass


def extension_for_content_type(content_type: str) -> str:
    """Map a MIME type to the file extension used in object keys."""
    content_type = (content_type or '').lower()
    for prefix, ext in CONTENT_TYPE_EXTENSIONS:
        if content_type.startswith(prefix):
            return ext
    return DEFAULT_EXTENSION


def build_photo_key(event_id, photo_id, content_type: str) -> str:
    """Object key for a photo: events/{event_id}/photos/{photo_id}{ext}."""
    return f"events/{event_id}/photos/{photo_id}{extension_for_content_type(content_type)}"


def build_archive_key(event_id, archive_id) -> str:
    """Object key for a bulk download zip."""
    return f"events/{event_id}/archives/{archive_id}.zip"


class S3Service:
    """Service for object storage operations with error handling."""

    def __init__(
        self,
        bucket_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        presign_endpoint_url: Optional[str] = None,
        public_domain: Optional[str] = None,
    ):
        """Initialize S3 clients from settings (overridable for tests)."""
        self.bucket_name = bucket_name or settings.R2_BUCKET_NAME
        self.public_domain = public_domain or settings.R2_PUBLIC_DOMAIN
        endpoint_url = endpoint_url or settings.STORAGE_ENDPOINT_URL
        presign_endpoint_url = presign_endpoint_url or settings.STORAGE_PRESIGN_ENDPOINT_URL

        try:
            # Server-side operations use the internal endpoint, presigned URLs
            # the endpoint reachable by clients.
            self.s3_client = self._make_client(endpoint_url)
            if presign_endpoint_url == endpoint_url:
                self.presign_client = self.s3_client
            else:
                self.presign_client = self._make_client(presign_endpoint_url)
            logger.debug(f"S3 Service initialized for bucket: {self.bucket_name}")
        except (BotoCoreError, ValueError) as e:
            logger.error(f"Failed to initialize S3 client: {e}")
            raise S3ServiceError(f"S3 initialization failed: {str(e)}")

    @staticmethod
    def _make_client(endpoint_url: str):
        return boto3.client(
            's3',
            endpoint_url=endpoint_url,
            aws_access_key_id=settings.R2_ACCESS_KEY,
            aws_secret_access_key=settings.R2_SECRET_ACCESS_KEY,
            region_name='auto',
            config=Config(
                signature_version='s3v4',
                s3={'addressing_style': 'path'}
            )
        )

    def _presign(self, client_method: str, params: dict, expires_in: int) -> str:
        try:
            return self.presign_client.generate_presigned_url(
                client_method,
                Params={'Bucket': self.bucket_name, **params},
                ExpiresIn=expires_in
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error generating presigned {client_method} URL: {e}")
            raise S3ServiceError(f"Failed to generate presigned URL: {str(e)}")

    def generate_presigned_upload_url(self, s3_key: str, content_type: str, expires_in: int) -> str:
        """
        Generate presigned PUT URL for direct upload from the client.

        Args:
            s3_key: Object key
            content_type: MIME type the client must send
            expires_in: URL expiration in seconds

        Returns:
            Presigned upload URL

        Raises:
            S3ServiceError: If URL generation fails
        """
        url = self._presign(
            'put_object',
            {'Key': s3_key, 'ContentType': content_type},
            expires_in
        )
        logger.debug(f"Generated PUT presigned URL for: {s3_key}")
        return url

    def generate_presigned_download_url(self, s3_key: str, expires_in: int, filename: Optional[str] = None) -> str:
        """
        Generate presigned GET URL.

        Args:
            s3_key: Object key
            expires_in: URL expiration in seconds
            filename: Optional attachment filename for Content-Disposition

        Returns:
            Presigned download URL
        """
        params = {'Key': s3_key}
        if filename:
            params['ResponseContentDisposition'] = f'attachment; filename="{filename}"'
        url = self._presign('get_object', params, expires_in)
        logger.debug(f"Generated download URL for: {s3_key}")
        return url

    def generate_presigned_delete_url(self, s3_key: str, expires_in: int) -> str:
        """Generate presigned DELETE URL."""
        url = self._presign('delete_object', {'Key': s3_key}, expires_in)
        logger.debug(f"Generated delete URL for: {s3_key}")
        return url

    def get_public_url(self, s3_key: str) -> str:
        """Public (unsigned) URL of an object under the configured domain."""
        return f"{self.public_domain.rstrip('/')}/{s3_key.lstrip('/')}"

    def download_file(self, s3_key: str) -> bytes:
        """
        Download file from storage and return raw bytes.

        Args:
            s3_key: Object key

        Returns:
            File content as bytes

        Raises:
            ObjectNotFoundError: If the key does not exist
            S3ServiceError: If download fails
        """
        try:
            response = self.s3_client.get_object(
                Bucket=self.bucket_name,
                Key=s3_key
            )
            file_bytes = response['Body'].read()
            logger.debug(f"Downloaded {len(file_bytes)} bytes from: {s3_key}")
            return file_bytes

        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', '')
            if error_code in ('NoSuchKey', '404'):
                raise ObjectNotFoundError(f"Object not found: {s3_key}")
            logger.error(f"Error downloading file: {e}")
            raise S3ServiceError(f"Failed to download file: {str(e)}")

    def upload_fileobj(self, fileobj: BinaryIO, s3_key: str, content_type: str = 'application/octet-stream') -> None:
        """
        Stream a file object to storage.

        Raises:
            S3ServiceError: If upload fails
        """
        try:
            self.s3_client.upload_fileobj(
                fileobj,
                self.bucket_name,
                s3_key,
                ExtraArgs={'ContentType': content_type}
            )
            logger.info(f"Uploaded object: {s3_key}")
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error uploading file: {e}")
            raise S3ServiceError(f"Failed to upload file: {str(e)}")
