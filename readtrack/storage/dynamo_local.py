from decimal import Decimal
import json

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError
from pydantic import BaseModel

from readtrack.models.achievement import (
    AchievementDefinition,
    AchievementProgressRecord,
    UserAchievement,
)
from readtrack.models.deadline import Deadline
from readtrack.storage.base import StorageBackend

# table -> (partition key, sort key); every user-owned table is partitioned by user_id
_KEYS: dict[str, tuple[str, str | None]] = {
    "Deadlines": ("user_id", "id"),
    "Achievements": ("id", None),
    "UserAchievements": ("user_id", "achievement_id"),
    "AchievementProgress": ("user_id", "achievement_id"),
}


def _to_item(model: BaseModel) -> dict:
    """Model -> DynamoDB item. Floats become Decimal, which boto3 requires for numbers."""
    return json.loads(model.model_dump_json(), parse_float=Decimal)


def _from_item(value):
    """Undo DynamoDB's Decimal numbers so pydantic sees plain int and float."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {k: _from_item(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_from_item(v) for v in value]
    return value


def _key_schema(partition: str, sort: str | None) -> tuple[list[dict], list[dict]]:
    roles = [(partition, "HASH")] + ([(sort, "RANGE")] if sort else [])
    schema = [{"AttributeName": name, "KeyType": role} for name, role in roles]
    attributes = [{"AttributeName": name, "AttributeType": "S"} for name, _ in roles]
    return schema, attributes


class DynamoLocalStorage(StorageBackend):
    """Deadlines and achievement records in DynamoDB Local. Missing tables are created."""

    def __init__(self, endpoint_url: str = "http://localhost:8000", region: str = "us-east-1"):
        self._resource = boto3.resource(
            "dynamodb",
            endpoint_url=endpoint_url,
            region_name=region,
            aws_access_key_id="local",
            aws_secret_access_key="local",
        )
        existing = {t.name for t in self._resource.tables.all()}
        for name, (partition, sort) in _KEYS.items():
            if name not in existing:
                schema, attributes = _key_schema(partition, sort)
                self._resource.create_table(
                    TableName=name,
                    KeySchema=schema,
                    AttributeDefinitions=attributes,
                    BillingMode="PAY_PER_REQUEST",
                )

    def _put(self, table_name: str, model: BaseModel) -> None:
        self._resource.Table(table_name).put_item(Item=_to_item(model))

    def _query_user(self, table_name: str, user_id: str) -> list[dict]:
        resp = self._resource.Table(table_name).query(
            KeyConditionExpression=Key("user_id").eq(user_id)
        )
        return [_from_item(i) for i in resp.get("Items", [])]

    # --- Deadlines ---

    def get_deadlines(self, user_id: str) -> list[Deadline]:
        return [Deadline.model_validate(i) for i in self._query_user("Deadlines", user_id)]

    def save_deadline(self, deadline: Deadline) -> None:
        if deadline.user_id is None:
            raise ValueError(f"Deadline {deadline.id} has no user_id")
        self._put("Deadlines", deadline)

    # --- Achievement catalog ---

    def get_active_achievements(self) -> list[AchievementDefinition]:
        try:
            resp = self._resource.Table("Achievements").scan(
                FilterExpression=Attr("is_active").eq(True)
            )
        except ClientError:
            return []
        achievements = [
            AchievementDefinition.model_validate(_from_item(i))
            for i in resp.get("Items", [])
        ]
        achievements.sort(key=lambda a: a.sort_order)
        return achievements

    def save_achievement(self, achievement: AchievementDefinition) -> None:
        self._put("Achievements", achievement)

    # --- UserAchievements ---

    def get_user_achievements(self, user_id: str) -> list[UserAchievement]:
        return [
            UserAchievement.model_validate(i)
            for i in self._query_user("UserAchievements", user_id)
        ]

    def save_user_achievement(self, user_achievement: UserAchievement) -> None:
        self._put("UserAchievements", user_achievement)

    # --- AchievementProgress ---

    def get_achievement_progress(self, user_id: str) -> list[AchievementProgressRecord]:
        return [
            AchievementProgressRecord.model_validate(i)
            for i in self._query_user("AchievementProgress", user_id)
        ]

    def save_achievement_progress(self, record: AchievementProgressRecord) -> None:
        # put_item replaces on the (user_id, achievement_id) key, i.e. an upsert
        self._put("AchievementProgress", record)
