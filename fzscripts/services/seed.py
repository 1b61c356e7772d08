"""Idempotent bootstrap: create the reserved admin account (and a sample script) once."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fzscripts.models import Script, User
from fzscripts.services import users

if TYPE_CHECKING:
    from fzscripts.core.config import Settings

logger = logging.getLogger(__name__)

SAMPLE_SCRIPT_TITLE = "Auto Game Bot"
SAMPLE_SCRIPT_DESCRIPTION = (
    "A powerful automation script for Roblox games that handles resource "
    "collection and combat."
)
SAMPLE_SCRIPT_CODE = """-- Auto Game Bot by {username}
local RunService = game:GetService("RunService")
local Players = game:GetService("Players")
local Player = Players.LocalPlayer

local Bot = {{}}
Bot.Running = false

function Bot:Start()
    self.Running = true

    self.Connection = RunService.RenderStepped:Connect(function(deltaTime)
        if not self.Running then return end

        self:CollectResources()
        self:AttackEnemies()
    end)

    print("Bot started successfully!")
end

function Bot:Stop()
    self.Running = false
    if self.Connection then
        self.Connection:Disconnect()
        self.Connection = nil
    end
    print("Bot stopped")
end

function Bot:CollectResources()
    local resources = workspace:FindFirstChild("Resources")
    if resources then
        -- Collect nearby resources
    end
end

function Bot:AttackEnemies()
    local enemies = workspace:FindFirstChild("Enemies")
    if enemies then
        -- Attack nearby enemies
    end
end

return Bot"""


def seed_bootstrap_admin(db: Session, settings: "Settings") -> User:
    """
    Ensure the bootstrap admin exists and return it.

    The unique username constraint is the real guard: if another process inserts
    the admin between our lookup and insert, we roll back and return its row.
    """
    username = settings.BOOTSTRAP_ADMIN_USERNAME
    existing = users.get_user_by_username(db, username)
    if existing is not None:
        logger.info("Bootstrap admin already present", extra={"username": username})
        return existing

    # Admin and sample script commit in one transaction.
    admin = users.build_user(
        username,
        settings.BOOTSTRAP_ADMIN_PASSWORD.get_secret_value(),
        privileged=True,
    )
    try:
        db.add(admin)
        db.flush()
        if settings.SEED_SAMPLE_SCRIPT:
            db.add(
                Script(
                    title=SAMPLE_SCRIPT_TITLE,
                    description=SAMPLE_SCRIPT_DESCRIPTION,
                    code=SAMPLE_SCRIPT_CODE.format(username=username),
                    language="lua",
                    category="combat",
                    user_id=admin.id,
                )
            )
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Bootstrap admin created concurrently", extra={"username": username})
        winner = users.get_user_by_username(db, username)
        if winner is None:
            raise
        return winner

    db.refresh(admin)
    logger.info("Bootstrap admin created", extra={"user_id": admin.id, "username": username})
    return admin
