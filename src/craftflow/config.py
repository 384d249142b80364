"""Layout tables shared by the module generator, project initializer and CLI."""

from __future__ import annotations

from types import MappingProxyType
from typing import Annotated, Dict, Mapping, Tuple

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _freeze_mapping(value: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(value))


FrozenMapping = Annotated[Mapping[str, str], AfterValidator(_freeze_mapping)]


class ModuleLayout(BaseModel):
    """Folders created for a module and the template rendered into each one."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: Tuple[str, ...] = Field(("src", "packages"), description="Path segments of the module root, relative to the project.")
    index_file: str = Field("index.ts", description="Name of the file written inside every module folder.")
    folders: FrozenMapping = Field(..., description="Folder name mapped to the template rendered into it, in creation order.")


class ManifestAdditions(BaseModel):
    """Entries merged into the project's ``package.json``."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True, validate_default=True)

    scripts: FrozenMapping = Field(default_factory=dict, description="npm scripts.")
    dependencies: FrozenMapping = Field(default_factory=dict, description="Runtime packages and version ranges.")
    dev_dependencies: FrozenMapping = Field(
        default_factory=dict,
        alias="devDependencies",
        description="Development-only packages and version ranges.",
    )

    def sections(self) -> Dict[str, Dict[str, str]]:
        """Return the additions keyed by their ``package.json`` section name."""

        return {
            "scripts": dict(self.scripts),
            "dependencies": dict(self.dependencies),
            "devDependencies": dict(self.dev_dependencies),
        }


class ProjectLayout(BaseModel):
    """Everything written by ``craftflow init``."""

    model_config = ConfigDict(extra="forbid", frozen=True, validate_default=True)

    source_root: str = Field("src", description="Folder holding the generated sources.")
    folders: Tuple[str, ...] = Field(..., description="Folders created under the source root.")
    initial_files: Tuple[str, ...] = Field(..., description="Templates copied verbatim under the source root.")
    initial_auth_files: Tuple[str, ...] = Field(default=(), description="Authentication templates copied after the initial files.")
    env: FrozenMapping = Field(default_factory=dict, description="Values written to every environment file.")
    env_files: Tuple[str, ...] = Field((".env", ".env.prod"), description="Environment files receiving the same content.")
    manifest: str = Field("package.json", description="Project manifest updated in place.")
    manifest_additions: ManifestAdditions = Field(default_factory=ManifestAdditions)
    install_command: Tuple[str, ...] = Field(
        ("npm", "install"),
        min_length=1,
        description="Command installing the manifest dependencies.",
    )

    def template_files(self) -> Tuple[str, ...]:
        return self.initial_files + self.initial_auth_files


DEFAULT_MODULE_LAYOUT = ModuleLayout(
    folders={
        "controllers": "base-controller.ts",
        "dtos": "base-dto.ts",
        "models": "base-model.ts",
        "routes": "base-route.ts",
        "services": "base-service.ts",
        "validations": "base-validation.ts",
    }
)

DEFAULT_PROJECT_LAYOUT = ProjectLayout(
    folders=("config", "database", "middlewares", "packages", "utils"),
    initial_files=(
        "app.ts",
        "server.ts",
        "config/index.ts",
        "database/index.ts",
        "middlewares/error-handler.ts",
        "middlewares/validate.ts",
        "packages/index.ts",
        "utils/api-error.ts",
        "utils/async-handler.ts",
    ),
    initial_auth_files=(
        "middlewares/authenticate.ts",
        "packages/auth/controllers/index.ts",
        "packages/auth/models/index.ts",
        "packages/auth/routes/index.ts",
        "packages/auth/services/index.ts",
        "packages/auth/validations/index.ts",
    ),
    env={
        "PORT": "5000",
        "NODE_ENV": "development",
        "MONGODB_URI": "mongodb://127.0.0.1:27017/app",
        "JWT_SECRET": "change-me",
        "JWT_EXPIRES_IN": "1d",
    },
    manifest_additions=ManifestAdditions(
        scripts={
            "dev": "ts-node-dev --respawn --transpile-only src/server.ts",
            "build": "tsc",
            "start": "node dist/server.js",
        },
        dependencies={
            "bcryptjs": "^2.4.3",
            "cors": "^2.8.5",
            "dotenv": "^16.4.5",
            "express": "^4.19.2",
            "helmet": "^7.1.0",
            "joi": "^17.13.1",
            "jsonwebtoken": "^9.0.2",
            "mongoose": "^8.4.1",
        },
        devDependencies={
            "@types/bcryptjs": "^2.4.6",
            "@types/cors": "^2.8.17",
            "@types/express": "^4.17.21",
            "@types/jsonwebtoken": "^9.0.6",
            "@types/node": "^20.14.2",
            "ts-node-dev": "^2.0.0",
            "typescript": "^5.4.5",
        },
    ),
)


__all__ = [
    "DEFAULT_MODULE_LAYOUT",
    "DEFAULT_PROJECT_LAYOUT",
    "ManifestAdditions",
    "ModuleLayout",
    "ProjectLayout",
]
