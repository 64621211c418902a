"""
Recruit Portal - Entry Point
"""

import os
from app import create_app

app = create_app(os.getenv('FLASK_ENV', 'development'))

if __name__ == '__main__':
    supabase_url = app.config.get('SUPABASE_URL') or 'not configured (set SUPABASE_URL)'
    admin_enabled = 'enabled' if app.config.get('ADMIN_PASSWORD') else 'disabled (set ADMIN_PASSWORD)'

    print("\n" + "=" * 60)
    print("   RECRUIT PORTAL - Candidate Onboarding")
    print("=" * 60)
    print("\n🚀 Server running at: http://localhost:5000/opportunities")
    print(f"🗄️  Supabase project: {supabase_url}")
    print(f"🔐 Admin panel (/admin/login): {admin_enabled}")
    print(f"💳 Payment hand-off: {app.config['PAYMENT_URL']}")
    print("\n" + "=" * 60 + "\n")

    app.run(host='0.0.0.0', port=5000, debug=app.config.get('DEBUG', False))
