"""
Admin Routes
Dashboard and moderation of users, requests and complaints
"""

from flask import Blueprint, current_app, g, jsonify, request

from extensions import db
from app.models.user import User
from app.models.delivery_request import DeliveryRequest, RequestStatus
from app.models.complaint import Complaint, ComplaintStatus, ComplaintType, ComplaintPriority
from app.services.account_service import AccountService
from app.utils.decorators import admin_required, check_permission, require_super_admin
from app.utils.errors import NotFoundError, ValidationError
from app.utils.pagination import enum_filter, page_args, paginate_query, search_filter
from app.utils.validation import json_body, optional_str, parse_enum

admin_bp = Blueprint('admin', __name__)

RECENT_LIMIT = 5


def _get_or_404(model, object_id, label):
    obj = db.session.get(model, object_id)
    if not obj:
        raise NotFoundError(f'{label} not found')
    return obj


@admin_bp.route('/dashboard/stats', methods=['GET'])
@admin_required()
@check_permission('view_analytics')
def dashboard_stats():
    """Get admin dashboard statistics"""
    recent_users = User.query.order_by(User.created_at.desc(), User.id.desc()).limit(RECENT_LIMIT).all()
    recent_requests = DeliveryRequest.query.order_by(
        DeliveryRequest.created_at.desc(), DeliveryRequest.id.desc()
    ).limit(RECENT_LIMIT).all()
    recent_complaints = Complaint.query.order_by(
        Complaint.created_at.desc(), Complaint.id.desc()
    ).limit(RECENT_LIMIT).all()

    return jsonify({
        'success': True,
        'stats': {
            'total_users': User.query.count(),
            'active_users': User.query.filter_by(is_active=True).count(),
            'total_requests': DeliveryRequest.query.count(),
            'active_requests': DeliveryRequest.query.filter_by(status=RequestStatus.ACTIVE).count(),
            'completed_requests': DeliveryRequest.query.filter_by(status=RequestStatus.COMPLETED).count(),
            'total_complaints': Complaint.query.count(),
            'pending_complaints': Complaint.query.filter_by(status=ComplaintStatus.PENDING).count(),
            'recent_users': [user.to_dict() for user in recent_users],
            'recent_requests': [req.to_dict(include_owner=True) for req in recent_requests],
            'recent_complaints': [complaint.to_dict() for complaint in recent_complaints],
        }
    }), 200


# ===== Users =====

@admin_bp.route('/users', methods=['GET'])
@admin_required()
@check_permission('manage_users')
def get_users():
    """Paginated user list; ``search`` matches name or email, ``type`` is exact"""
    page, limit = page_args()
    search = request.args.get('search', '').strip()
    user_type = request.args.get('type', '').strip()

    query = User.query
    if search:
        query = query.filter(search_filter(search, User.name, User.email))
    if user_type:
        query = query.filter(User.type == user_type)

    result = paginate_query(query, User, page, limit)

    return jsonify({
        'success': True,
        'users': [user.to_dict() for user in result['items']],
        'total': result['total'],
        'total_pages': result['total_pages'],
        'current_page': result['current_page'],
        'per_page': result['per_page'],
    }), 200


@admin_bp.route('/users/<int:user_id>/toggle-status', methods=['PATCH'])
@admin_required()
@check_permission('manage_users')
def toggle_user_status(user_id):
    """Block or unblock a user"""
    user = _get_or_404(User, user_id, 'User')

    is_active = user.toggle_active()
    db.session.commit()

    current_app.logger.info('Admin %s %s user %s', g.current_admin.username,
                            'unblocked' if is_active else 'blocked', user.id)

    return jsonify({
        'success': True,
        'message': f"User {'unblocked' if is_active else 'blocked'} successfully",
        'user': user.to_dict(),
    }), 200


@admin_bp.route('/users/<int:user_id>', methods=['DELETE'])
@admin_required()
@require_super_admin()
def delete_user(user_id):
    """Delete a user with their requests and related complaints"""
    user = _get_or_404(User, user_id, 'User')
    AccountService.delete_user(user)

    return jsonify({
        'success': True,
        'message': 'User deleted successfully',
    }), 200


# ===== Requests =====

@admin_bp.route('/requests', methods=['GET'])
@admin_required()
@check_permission('manage_requests')
def get_requests():
    """Paginated request list; ``search`` matches title or description"""
    page, limit = page_args()
    search = request.args.get('search', '').strip()
    status = request.args.get('status', '').strip()

    query = DeliveryRequest.query
    if status:
        query = query.filter(enum_filter(DeliveryRequest.status, RequestStatus, status, 'status'))
    if search:
        query = query.filter(search_filter(search, DeliveryRequest.title, DeliveryRequest.description))

    result = paginate_query(query, DeliveryRequest, page, limit)

    return jsonify({
        'success': True,
        'requests': [req.to_dict(include_owner=True) for req in result['items']],
        'total': result['total'],
        'total_pages': result['total_pages'],
        'current_page': result['current_page'],
        'per_page': result['per_page'],
    }), 200


@admin_bp.route('/requests/<int:request_id>/complete', methods=['PATCH'])
@admin_required()
@check_permission('manage_requests')
def complete_request(request_id):
    """Mark a request as completed"""
    delivery_request = _get_or_404(DeliveryRequest, request_id, 'Request')

    delivery_request.complete()
    db.session.commit()

    current_app.logger.info('Admin %s completed request %s', g.current_admin.username, request_id)

    return jsonify({
        'success': True,
        'message': 'Request marked as completed',
        'request': delivery_request.to_dict(include_owner=True),
    }), 200


@admin_bp.route('/requests/<int:request_id>', methods=['DELETE'])
@admin_required()
@check_permission('manage_requests')
def delete_request(request_id):
    """Delete a request (for inappropriate content)"""
    delivery_request = _get_or_404(DeliveryRequest, request_id, 'Request')
    AccountService.delete_request(delivery_request)

    current_app.logger.info('Admin %s deleted request %s', g.current_admin.username, request_id)

    return jsonify({
        'success': True,
        'message': 'Request deleted successfully',
    }), 200


# ===== Complaints =====

@admin_bp.route('/complaints', methods=['GET'])
@admin_required()
@check_permission('handle_complaints')
def get_complaints():
    """Paginated complaint list filtered by status, type and priority"""
    page, limit = page_args()

    query = Complaint.query
    filters = (
        ('status', Complaint.status, ComplaintStatus),
        ('type', Complaint.type, ComplaintType),
        ('priority', Complaint.priority, ComplaintPriority),
    )
    for field, column, enum_cls in filters:
        value = request.args.get(field, '').strip()
        if value:
            query = query.filter(enum_filter(column, enum_cls, value, field))

    result = paginate_query(query, Complaint, page, limit)

    return jsonify({
        'success': True,
        'complaints': [complaint.to_dict(include_parties=True) for complaint in result['items']],
        'total': result['total'],
        'total_pages': result['total_pages'],
        'current_page': result['current_page'],
        'per_page': result['per_page'],
    }), 200


@admin_bp.route('/complaints/<int:complaint_id>', methods=['PATCH'])
@admin_required()
@check_permission('handle_complaints')
def update_complaint(complaint_id):
    """Update complaint status, admin response or priority"""
    complaint = _get_or_404(Complaint, complaint_id, 'Complaint')
    data = json_body()

    status = data.get('status')
    admin_response = optional_str(data, 'admin_response')
    priority = data.get('priority')

    if not any([status, admin_response, priority]):
        raise ValidationError('Provide status, admin_response or priority')

    if status:
        complaint.set_status(parse_enum(ComplaintStatus, status, 'status'))
    if priority:
        complaint.priority = parse_enum(ComplaintPriority, priority, 'priority')
    if admin_response:
        complaint.admin_response = admin_response

    complaint.handled_by_id = g.current_admin.id
    db.session.commit()

    current_app.logger.info('Admin %s updated complaint %s (status=%s)',
                            g.current_admin.username, complaint.id, complaint.status.value)

    return jsonify({
        'success': True,
        'message': 'Complaint updated successfully',
        'complaint': complaint.to_dict(include_parties=True),
    }), 200
