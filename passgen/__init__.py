"""passgen: rule-balanced password generation with a strength estimate."""

from .errors import InvalidLength, NoClassEnabled, PasswordGeneratorError
from .generator import Generator, generate_password
from .models import CharRule, GenerationRequest
from .strength import estimate_entropy_bits, get_password_strength, strength_label

__version__ = "0.1.0"
