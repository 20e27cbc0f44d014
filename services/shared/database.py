"""
DynamoDB connection and management
"""
import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .config import config

logger = logging.getLogger(__name__)


class Database:
    """DynamoDB table handle

    The boto3 resource is created on first use and then reused by every
    invocation served by the process. There is no teardown.
    """

    def __init__(self, config):
        self.config = config
        self._table = None

    @property
    def table(self):
        """Get the movie table, connecting on first access"""
        if self._table is None:
            self._table = self._connect()
        return self._table

    def _connect(self):
        resource = boto3.resource(
            "dynamodb",
            region_name=self.config.region,
            endpoint_url=self.config.dynamodb_endpoint_url,
        )
        logger.info(f"DynamoDB table handle created for {self.config.table_name} in {self.config.region}")
        return resource.Table(self.config.table_name)

    def health_check(self) -> Optional[str]:
        """Check the table is reachable, returning its status or None"""
        try:
            response = self.table.meta.client.describe_table(TableName=self.config.table_name)
            return response["Table"]["TableStatus"]
        except (BotoCoreError, ClientError) as e:
            logger.error(f"DynamoDB health check failed: {str(e)}")
            return None


# Process-wide handle shared by all handlers
database = Database(config.aws)
