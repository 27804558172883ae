"""
Delivery Request Routes
"""

from decimal import Decimal, InvalidOperation

from flask import Blueprint, current_app, g, jsonify

from extensions import db
from app.models.delivery_request import DeliveryRequest
from app.utils.decorators import login_required
from app.utils.errors import NotFoundError, ValidationError
from app.utils.validation import json_body, optional_str, require_str

requests_bp = Blueprint('requests', __name__)


def _parse_price(value):
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValidationError('price must be a number')
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError('price must be a number')
    if not price.is_finite() or price < 0:
        raise ValidationError('price must be zero or greater')
    return price


@requests_bp.route('/requests', methods=['GET'])
@login_required()
def get_my_requests():
    """List the signed-in user's requests"""
    requests = g.current_user.requests.all()
    return jsonify({
        'success': True,
        'requests': [req.to_dict() for req in requests],
    }), 200


@requests_bp.route('/requests', methods=['POST'])
@login_required()
def create_request():
    """Post a new delivery request"""
    data = json_body()

    title = require_str(data, 'title')
    description = require_str(data, 'description')
    if data.get('price') in (None, ''):
        raise ValidationError('price is required')

    delivery_request = DeliveryRequest(
        owner_id=g.current_user.id,
        title=title,
        description=description,
        price=_parse_price(data['price']),
        category=optional_str(data, 'category') or 'general',
        location=optional_str(data, 'location') or '',
    )

    db.session.add(delivery_request)
    db.session.commit()

    current_app.logger.info('User %s created request %s', g.current_user.id, delivery_request.id)

    return jsonify({
        'success': True,
        'message': 'Request created successfully',
        'request': delivery_request.to_dict(),
    }), 201


@requests_bp.route('/allrequests', methods=['GET'])
@login_required()
def get_all_requests():
    """List every request with its owner"""
    requests = DeliveryRequest.query.order_by(
        DeliveryRequest.created_at.desc(), DeliveryRequest.id.desc()
    ).all()
    return jsonify({
        'success': True,
        'requests': [req.to_dict(include_owner=True) for req in requests],
    }), 200


@requests_bp.route('/requests/<int:request_id>', methods=['GET'])
@login_required()
def accept_request(request_id):
    """Open a request and mark it accepted"""
    delivery_request = db.session.get(DeliveryRequest, request_id)

    if not delivery_request:
        raise NotFoundError('Request not found')

    delivery_request.accept()
    db.session.commit()

    current_app.logger.info('User %s accepted request %s', g.current_user.id, request_id)

    return jsonify({
        'success': True,
        'request': delivery_request.to_dict(include_owner=True),
    }), 200
