from .record import MINOR_AGE, LicenseRecord, age_on

__all__ = ["MINOR_AGE", "LicenseRecord", "age_on"]
