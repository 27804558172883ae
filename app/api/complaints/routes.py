from flask import Blueprint, jsonify, g, current_app

from extensions import db
from app.models.complaint import Complaint, ComplaintType, ComplaintPriority
from app.models.delivery_request import DeliveryRequest
from app.models.user import User
from app.utils.errors import NotFoundError, ValidationError
from app.utils.decorators import login_required
from app.utils.validation import json_body, optional_id, optional_str, parse_enum

complaints_bp = Blueprint('complaints', __name__)


@complaints_bp.route('', methods=['POST'])
@login_required()
def submit_complaint():
    """Submit a new complaint"""
    data = json_body()

    complaint_type = optional_str(data, 'type')
    title = optional_str(data, 'title') or ''
    description = optional_str(data, 'description') or ''

    if not all([complaint_type, title, description]):
        raise ValidationError('Type, title, and description are required')

    if len(title) > Complaint.TITLE_MAX_LENGTH:
        raise ValidationError(f'Title must be at most {Complaint.TITLE_MAX_LENGTH} characters')

    if len(description) > Complaint.DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f'Description must be at most {Complaint.DESCRIPTION_MAX_LENGTH} characters'
        )

    reported_user_id = optional_id(data, 'reported_user_id')
    if reported_user_id is not None and not db.session.get(User, reported_user_id):
        raise NotFoundError('Reported user not found')

    request_id = optional_id(data, 'request_id')
    if request_id is not None and not db.session.get(DeliveryRequest, request_id):
        raise NotFoundError('Request not found')

    complaint = Complaint(
        reported_by_id=g.current_user.id,
        reported_user_id=reported_user_id,
        request_id=request_id,
        type=parse_enum(ComplaintType, complaint_type, 'type'),
        priority=parse_enum(ComplaintPriority, data.get('priority', 'medium'), 'priority'),
        title=title,
        description=description,
    )

    db.session.add(complaint)
    db.session.commit()

    current_app.logger.info('User %s filed complaint %s', g.current_user.id, complaint.id)

    return jsonify({
        'success': True,
        'message': 'Complaint submitted successfully',
        'complaint': complaint.to_dict()
    }), 201


@complaints_bp.route('', methods=['GET'])
@login_required()
def get_my_complaints():
    """List complaints filed by the signed-in user"""
    complaints = Complaint.query.filter_by(reported_by_id=g.current_user.id).order_by(
        Complaint.created_at.desc(), Complaint.id.desc()
    ).all()
    return jsonify({
        'success': True,
        'complaints': [complaint.to_dict() for complaint in complaints]
    }), 200
