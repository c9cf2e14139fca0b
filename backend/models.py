from sqlalchemy import Column, String, Integer, Boolean, Text, DateTime, ForeignKey, JSON, CheckConstraint, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from database import Base
from constants import ProviderType
from utils.uuid_helper import generate_uuid


class User(Base):
    __tablename__ = 'users'

    id = Column(String, primary_key=True, default=generate_uuid)
    email = Column(String(255), nullable=False, unique=True)
    password = Column(String, nullable=False)  # bcrypt hash, never the plain password
    provider = Column(String(20), nullable=False, default=ProviderType.NORMAL.value)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)


class EmailCategory(Base):
    """
    Groups the email templates sent for a kind of event (e.g. "Contact us").

    Deleting a category removes its email contents. Forms may point at a
    category; the service refuses to delete a category that is still in use.
    """
    __tablename__ = 'email_categories'

    id = Column(String, primary_key=True, default=generate_uuid)
    title = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    contents = relationship(
        "EmailContent",
        back_populates="email_category",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    forms = relationship("Form", back_populates="email_category", passive_deletes="all")


class EmailContent(Base):
    """One language/label variant of an email within a category."""
    __tablename__ = 'email_contents'

    id = Column(String, primary_key=True, default=generate_uuid)
    email_category_id = Column(String, ForeignKey('email_categories.id', ondelete='CASCADE'), nullable=False)
    language = Column(String(2), nullable=False)
    label = Column(String(100), nullable=False)
    send_to = Column(Text, nullable=False, default='')
    cc_email = Column(Text, nullable=False, default='')
    bcc_email = Column(Text, nullable=False, default='')
    send_from_email = Column(String(255), nullable=False)
    send_from_name = Column(String(100), nullable=False, default='')
    subject = Column(String(255), nullable=False)
    top_img_link = Column(String(255), nullable=False, default='')
    header = Column(Text, nullable=False, default='')
    paragraph = Column(Text, nullable=False, default='')
    footer = Column(Text, nullable=False, default='')
    footer_image_link = Column(String(255), nullable=False, default='')
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    email_category = relationship("EmailCategory", back_populates="contents")

    __table_args__ = (
        CheckConstraint("language IN ('th', 'en')", name='ck_email_content_language'),
        UniqueConstraint('email_category_id', 'language', 'label', name='uq_email_content_category_lang_label'),
    )


class Form(Base):
    """
    A form definition built in the CMS.

    Aggregate root for FormSection and FormField: sections and fields are
    always written together with their form and come back ordered by
    order_index.
    """
    __tablename__ = 'forms'

    id = Column(String, primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    email_category_id = Column(String, ForeignKey('email_categories.id', ondelete='RESTRICT'), nullable=True)
    language = Column(String(2), nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    email_category = relationship("EmailCategory", back_populates="forms")
    sections = relationship(
        "FormSection",
        back_populates="form",
        order_by="FormSection.order_index",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("name != ''"),
        Index('idx_forms_updated_at', 'updated_at'),
    )


class FormSection(Base):
    __tablename__ = 'form_sections'

    id = Column(String, primary_key=True, default=generate_uuid)
    form_id = Column(String, ForeignKey('forms.id', ondelete='CASCADE'), nullable=False)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    order_index = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    form = relationship("Form", back_populates="sections")
    fields = relationship(
        "FormField",
        back_populates="section",
        order_by="FormField.order_index",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index('idx_form_sections_form', 'form_id', 'order_index'),
    )


class FormField(Base):
    __tablename__ = 'form_fields'

    id = Column(String, primary_key=True, default=generate_uuid)
    section_id = Column(String, ForeignKey('form_sections.id', ondelete='CASCADE'), nullable=False)
    label = Column(String(255), nullable=False)
    field_key = Column(String(100), nullable=False)
    field_type = Column(String(20), nullable=False)
    placeholder = Column(String(255), nullable=True)
    is_required = Column(Boolean, nullable=False, default=False)
    default_value = Column(Text, nullable=True)
    properties = Column(JSON, nullable=True)  # e.g. dropdown options, min/max
    display = Column(JSON, nullable=True)  # layout hints for the renderer
    order_index = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    section = relationship("FormSection", back_populates="fields")

    __table_args__ = (
        Index('idx_form_fields_section', 'section_id', 'order_index'),
    )


class FormSubmission(Base):
    """
    A filled-in form.

    form_id uses ON DELETE RESTRICT: a form with submissions cannot be deleted.
    """
    __tablename__ = 'form_submissions'

    id = Column(String, primary_key=True, default=generate_uuid)
    form_id = Column(String, ForeignKey('forms.id', ondelete='RESTRICT'), nullable=False)
    submitted_data = Column(JSON, nullable=False)
    submitted_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    submitted_email = Column(String(255), nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    form = relationship("Form")

    __table_args__ = (
        Index('idx_form_submissions_form', 'form_id', 'created_at'),
    )
