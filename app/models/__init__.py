# Registra todos los modelos en Base.metadata
from app.models.usuarios import User
from app.models.posts import PostType, Post, PostImage
from app.models.enlaces import Video
from app.models.formularios import FormSubmission

__all__ = ["User", "PostType", "Post", "PostImage", "Video", "FormSubmission"]
