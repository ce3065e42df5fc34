"""
Tech Tag Mapper - Data Definitions

Pydantic models for the canonical tag vocabulary and the project
profile whose stack fields are mapped onto it.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TechTag(str, Enum):
    """
    Closed vocabulary of canonical technology tags.

    UNIVERSAL is a sentinel meaning "applies to any project"; it is never
    produced from a project's stack fields.
    """
    # Languages
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    RUST = "rust"
    GO = "go"
    JAVA = "java"
    KOTLIN = "kotlin"
    SWIFT = "swift"
    DART = "dart"
    RUBY = "ruby"
    PHP = "php"
    CSHARP = "csharp"

    # Frameworks
    REACT = "react"
    NEXTJS = "nextjs"
    VUE = "vue"
    NUXT = "nuxt"
    ANGULAR = "angular"
    SVELTE = "svelte"
    EXPRESS = "express"
    FASTIFY = "fastify"
    NESTJS = "nestjs"
    DJANGO = "django"
    FASTAPI = "fastapi"
    FLASK = "flask"
    TAURI = "tauri"
    ELECTRON = "electron"
    SWIFTUI = "swiftui"
    FLUTTER = "flutter"
    RAILS = "rails"
    LARAVEL = "laravel"
    SPRING = "spring"

    # Platforms
    IOS = "ios"
    ANDROID = "android"

    # Testing
    VITEST = "vitest"
    JEST = "jest"
    PYTEST = "pytest"
    PLAYWRIGHT = "playwright"
    CYPRESS = "cypress"

    # Styling
    TAILWIND = "tailwind"
    SASS = "sass"
    CSS_MODULES = "css-modules"

    # State management
    ZUSTAND = "zustand"
    REDUX = "redux"
    PINIA = "pinia"

    # Databases
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    SQLITE = "sqlite"
    MONGODB = "mongodb"
    REDIS = "redis"
    SUPABASE = "supabase"
    FIREBASE = "firebase"

    # Auth
    CLERK = "clerk"
    AUTH0 = "auth0"
    NEXTAUTH = "nextauth"

    # Hosting
    VERCEL = "vercel"
    NETLIFY = "netlify"
    RAILWAY = "railway"
    RENDER = "render"
    AWS = "aws"
    FLYIO = "flyio"
    CLOUDFLARE = "cloudflare"

    # Payments
    STRIPE = "stripe"
    LEMONSQUEEZY = "lemonsqueezy"
    PADDLE = "paddle"

    # Monitoring
    SENTRY = "sentry"
    POSTHOG = "posthog"
    DATADOG = "datadog"
    LOGROCKET = "logrocket"

    # Email
    SENDGRID = "sendgrid"
    POSTMARK = "postmark"
    RESEND = "resend"

    UNIVERSAL = "universal"

    def __str__(self) -> str:
        return self.value


class StackExtras(BaseModel):
    """Optional extra services configured for a project."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    auth: Optional[str] = None
    hosting: Optional[str] = None
    payments: Optional[str] = None
    monitoring: Optional[str] = None
    email: Optional[str] = None
    cache: Optional[str] = None


class ProjectProfile(BaseModel):
    """
    Read-only snapshot of a project's declared stack.

    Accepts the host application's camelCase records as well as
    snake_case keyword arguments. Fields the engine does not read
    (health score, timestamps, ...) are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    language: str = Field(
        default="",
        description="Primary language as entered by the user (e.g. 'TypeScript')."
    )

    framework: Optional[str] = None
    database: Optional[str] = None
    testing: Optional[str] = Field(
        default=None,
        description="Test framework (e.g. 'Vitest', 'pytest')."
    )
    styling: Optional[str] = None

    stack_extras: Optional[StackExtras] = Field(
        default=None,
        description="Auth, hosting, payments, monitoring, email and cache providers."
    )

    id: Optional[str] = None
    name: Optional[str] = None
