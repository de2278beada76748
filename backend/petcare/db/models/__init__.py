# backend/petcare/db/models/__init__.py

from petcare.db.models.user import User
from petcare.db.models.animal import Animal
from petcare.db.models.animal_image import AnimalImage
from petcare.db.models.post import Post
from petcare.db.models.medical_case import MedicalCase

from petcare.db.models.veterinary import Veterinary
from petcare.db.models.pet_store import PetStore
from petcare.db.models.charity import Charity
from petcare.db.models.advertisement import Advertisement
