"""
Data repository layer
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)


class MovieRepository:
    """Movie data repository

    Thin wrapper over the DynamoDB table keyed by ``id``. Store failures are
    logged and re-raised; absence is reported as ``None``.
    """

    def __init__(self, table):
        self.table = table

    def get(self, movie_id: str) -> Optional[Dict[str, Any]]:
        """Get movie by ID"""
        try:
            response = self.table.get_item(Key={"id": movie_id})
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error fetching movie {movie_id}: {str(e)}")
            raise
        return response.get("Item")

    def put(self, movie: Dict[str, Any]) -> Dict[str, Any]:
        """Insert or fully overwrite a movie"""
        try:
            self.table.put_item(Item=movie)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error writing movie {movie.get('id')}: {str(e)}")
            raise
        return movie

    def delete(self, movie_id: str) -> None:
        """Delete a movie"""
        try:
            self.table.delete_item(Key={"id": movie_id})
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error deleting movie {movie_id}: {str(e)}")
            raise

    def scan_all(self) -> List[Dict[str, Any]]:
        """Every movie in the table, unordered"""
        return self._scan()

    def scan_filtered(self, field_name: str, field_value: Any,
                      projected_fields: Iterable[str]) -> List[Dict[str, Any]]:
        """Every movie whose field equals the value exactly, projected"""
        names = {f"#p{i}": field for i, field in enumerate(projected_fields)}
        return self._scan(
            FilterExpression=Attr(field_name).eq(field_value),
            ProjectionExpression=", ".join(names),
            ExpressionAttributeNames=names,
        )

    def _scan(self, **params) -> List[Dict[str, Any]]:
        items: List[Dict[str, Any]] = []
        try:
            while True:
                response = self.table.scan(**params)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                params["ExclusiveStartKey"] = last_key
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error scanning movies: {str(e)}")
            raise
        logger.debug(f"Scan returned {len(items)} movies")
        return items
