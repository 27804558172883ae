"""
Account Service
Registration and cascade deletion of student accounts
"""

from flask import current_app
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from extensions import db
from app.models.user import User
from app.models.delivery_request import DeliveryRequest
from app.models.complaint import Complaint
from app.utils.errors import ConflictError, StoreError


class AccountService:
    """Service for creating and removing student accounts"""

    @staticmethod
    def register(name, email, password, type):
        """Create a user; a taken email raises ConflictError"""
        if User.query.filter_by(email=email.strip().lower()).first():
            raise ConflictError('User already exists')

        user = User(name=name.strip(), email=email, password=password, type=type)
        db.session.add(user)
        try:
            db.session.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            db.session.rollback()
            raise ConflictError('User already exists')

        current_app.logger.info('Registered user %s', user.id)
        return user

    @staticmethod
    def delete_user(user):
        """
        Delete a user and everything that references them in one transaction

        Removes complaints filed by or about the user and the user's requests.
        Complaints filed by others about those requests keep their row but
        lose the request link.
        """
        user_id = user.id
        owned_request_ids = db.session.query(DeliveryRequest.id).filter(
            DeliveryRequest.owner_id == user_id
        )

        try:
            Complaint.query.filter(
                or_(Complaint.reported_by_id == user_id, Complaint.reported_user_id == user_id)
            ).delete(synchronize_session=False)

            Complaint.query.filter(
                Complaint.request_id.in_(owned_request_ids.scalar_subquery())
            ).update({Complaint.request_id: None}, synchronize_session=False)

            DeliveryRequest.query.filter(
                DeliveryRequest.owner_id == user_id
            ).delete(synchronize_session=False)

            db.session.delete(user)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception('Cascade delete of user %s failed', user_id)
            raise StoreError('Failed to delete user')

        current_app.logger.info('Deleted user %s with requests and complaints', user_id)

    @staticmethod
    def delete_request(delivery_request):
        """Delete a request, unlinking complaints that pointed at it"""
        request_id = delivery_request.id
        try:
            Complaint.query.filter(Complaint.request_id == request_id).update(
                {Complaint.request_id: None}, synchronize_session=False
            )
            db.session.delete(delivery_request)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception('Delete of request %s failed', request_id)
            raise StoreError('Failed to delete request')
