from django.db import models


class AuditableCreateModel(models.Model):
    created_by = models.IntegerField(blank=True, null=True)
    created_date = models.DateTimeField(blank=True, null=True)

    class Meta:
        abstract = True


class AuditableModel(AuditableCreateModel):
    """
    Audit columns shared by payment records. ``created_by`` / ``updated_by``
    hold the billing customer id once it is known.
    """

    updated_by = models.IntegerField(blank=True, null=True)
    updated_date = models.DateTimeField(blank=True, null=True)

    class Meta:
        abstract = True
